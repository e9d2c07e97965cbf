"""Record extraction and emission."""
