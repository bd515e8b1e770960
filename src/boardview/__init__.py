"""Filter, sort, paginate and export board snapshots."""
