"""Authentication: password digests, token issuance and the access gate."""
