"""
Basic confusion matrix example comparing classifier output with expert labels.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from classification_agreement import ClassificationList, build_confusion_matrix, LABEL_VOCABULARY

# Classifier output (.acl) and expert ground truth (.pcl) for a two-subsample run
classifier_output = ClassificationList.from_text(
    "<RUN>run_0001</RUN>\n"
    "<CLASS>RBC,WBC,SQEP,,BACT</CLASS>\n"
    "<CLASS>CAOX,URIC</CLASS>\n"
)
ground_truth = ClassificationList.from_text(
    "<RUN>run_0001</RUN>\n"
    "<CLASS>RBC,RBC,SQEP,BUBB,BACT</CLASS>\n"
    "<CLASS>CAOX,CAOX</CLASS>\n"
)

print(f"Subsamples: {classifier_output.subsample_count}")
print(f"Classifier labels (subsample 1): {classifier_output.labels(1)}")
print(f"Expert labels (subsample 1):     {ground_truth.labels(1)}")

matrix = build_confusion_matrix(classifier_output, ground_truth, subsample=1)

print("\nNon-zero cells (predicted -> actual):")
print("=" * 50)
counts = matrix.as_array()
for row, predicted in enumerate(LABEL_VOCABULARY):
    for col, actual in enumerate(LABEL_VOCABULARY):
        if counts[row, col]:
            print(f"   {predicted:>5} -> {actual:<5} {counts[row, col]}")

# Append to a matrix file the same way the batch tool does
matrix.append_to("ConfusionMatrix.txt")
print("\nAppended matrix to ConfusionMatrix.txt")
