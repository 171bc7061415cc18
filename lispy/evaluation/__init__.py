from lispy.evaluation.evaluator import evaluate, reduce_sexpr

__all__ = ["evaluate", "reduce_sexpr"]
