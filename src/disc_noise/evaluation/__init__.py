from disc_noise.evaluation.performance import auc, brier_score, evaluate_model, mcc, performance_metrics

__all__ = ["auc", "brier_score", "evaluate_model", "mcc", "performance_metrics"]
