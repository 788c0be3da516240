from spatialgraph.solvers.force_model import ForceModel
from spatialgraph.solvers.eades import EadesForceModel
from spatialgraph.solvers.layout import ErrorMetric, LayoutResult, SpringEmbedderLayout

__all__ = ["ForceModel", "EadesForceModel", "ErrorMetric", "LayoutResult", "SpringEmbedderLayout"]
