"""Labs HR and recruitment management API."""
