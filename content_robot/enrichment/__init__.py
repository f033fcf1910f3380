"""enrichment subpackage."""
