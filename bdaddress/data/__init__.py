"""Reference data for the Division -> District -> Upazila hierarchy."""
