# masscompare/orchestrator/__init__.py
#
# Standard import:
#   from masscompare.orchestrator import compare_directories

from masscompare.orchestrator.directory import (
    DirectoryComparisonOrchestrator,
    compare_directories,
    join_path,
)
