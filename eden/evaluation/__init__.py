from eden.evaluation.evaluator import evaluate
from eden.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
