"""HTTP layer serving planet visibility reports."""
