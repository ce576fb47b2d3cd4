"""Team BFF: team/account management API forwarding to an upstream REST API."""
