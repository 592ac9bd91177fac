"""HTTP service exposing the calibration extractor."""
