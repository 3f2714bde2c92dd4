"""
Label-pivoted micro/macro F evaluation of multi-label predictions.

Usage:
    python scripts/evaluate_multilabel.py LABELS_FILE CORPUS_FILE PREDICTIONS_FILE [CONFIG_FILE]

LABELS_FILE holds one label per line; CORPUS_FILE and PREDICTIONS_FILE are
JSON lines with "id" and "labels" fields.
"""
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sparselinear.core import Config, configure_logging
from sparselinear.core.config import DEFAULT_CONFIG_PATH
from sparselinear.evaluation import (
    JsonLinesCorpus,
    LabelVocabulary,
    MultiLabelEvaluator,
    load_predictions,
)


def main(argv):
    if len(argv) < 3:
        print(__doc__)
        return 1

    labels_file, corpus_file, predictions_file = argv[:3]
    config_file = argv[3] if len(argv) > 3 else DEFAULT_CONFIG_PATH

    config = Config.load(config_file) if Path(config_file).exists() else None
    configure_logging(config)
    zero_division = config.get("evaluation.zero_division", "raise") if config else "raise"

    start = time.perf_counter()

    evaluator = MultiLabelEvaluator(
        labels=LabelVocabulary.load(labels_file),
        corpus=JsonLinesCorpus(corpus_file),
        predictions=load_predictions(predictions_file),
        zero_division=zero_division,
    )
    scores = evaluator.evaluate()

    print(scores.summary())
    print(f"Elapsed: {time.perf_counter() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
