from figure_service.core.use_cases.classify_point import ClassifyPoint, format_result

__all__ = ["ClassifyPoint", "format_result"]
