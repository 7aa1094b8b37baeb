# usage_example.py
# Minimal usage example for masscompare/orchestrator/directory.py.
# This file is not part of the masscompare package. For reference only.

from masscompare import CompareParameters, compare_directories
from masscompare.core.logging_layer import EventFilter, EventLogger

# Inputs
dir_a: str = "/data/export/2024-06-01"
dir_b: str = "/mnt/backup/export/2024-06-01"

params = CompareParameters(
    chunk_size=32_000,    # bytes per read, per buffer
    threaded=True,        # one worker per file, joined at the end
    max_workers=64,       # bound the fan-out for large directories
    strict_size=True,     # sizes must match before any byte is read
)
logger = EventLogger()

# Compute
report = compare_directories(dir_a, dir_b, params=params, logger=logger)

# Inspect
for line in report.lines():
    print(line)

print(f"{report.total_files} files, "
      f"{len(report.mismatches)} differ, "
      f"{len(report.errors)} could not be compared")

for event in logger.query_events(EventFilter(event_type="FILE_ERROR")):
    print(event.id, event.data["message"], event.data["path"])

# Expected output shape:
# /data/export/2024-06-01/orders.csv
# Path to file B was invalid: /data/export/2024-06-01/refunds.csv
# 120 files, 1 differ, 1 could not be compared
# EVT-0000000000000003 Path to file B was invalid /data/export/2024-06-01/refunds.csv

# DirectoryAccessError example:
# compare_directories("/does/not/exist", dir_b)   # directory A not enumerable
