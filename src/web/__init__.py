"""HTTP interface for the SPAC compliance engine."""
