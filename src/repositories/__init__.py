"""Data access for DynamoDB."""
