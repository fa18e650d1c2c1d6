"""Business logic services used by handlers.

Services are imported lazily by handlers so that boto3 resources are only
built when a request actually needs them.
"""
