"""
Batch example: one confusion matrix per run listed in a run list file.

The run list's first line is the directory holding the .acl/.pcl files,
followed by one run name per line.
"""

import sys
import os
import logging
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from classification_agreement import AgreementBatch

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

batch = AgreementBatch(destination="output", subsample=1)
summary = batch.run("datasets/runfile.txt")

print(f"Processed: {len(summary.processed)} runs")
print(f"Failed:    {len(summary.failed)} runs")
for run_name in summary.failed:
    print(f"   - {run_name}")
print(f"Matrices appended to {summary.matrix_path}")
