"""Identity application layer: roles, profiles and the access-control gate."""
