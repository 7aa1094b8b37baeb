# masscompare/worker/__init__.py

from masscompare.worker.file_worker import (
    FileComparisonWorker,
    compare_file_pair,
    describe_failure,
)
