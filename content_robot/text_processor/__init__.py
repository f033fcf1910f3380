"""text_processor subpackage."""
