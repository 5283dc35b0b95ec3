"""Log and profile loading."""

from tdeetrack.data.log_loader import load_biometrics, load_intake_log, load_weight_log

__all__ = ["load_biometrics", "load_intake_log", "load_weight_log"]
