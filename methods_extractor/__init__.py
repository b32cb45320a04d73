from methods_extractor.core.constants import OutputKind, ScriptTarget
from methods_extractor.data_models.models import ExtractorOptions
from methods_extractor.data_models.schemas import ExtractorOutput, MethodRecord
from methods_extractor.extractor import Extractor, extract

__all__ = [
    "Extractor",
    "ExtractorOptions",
    "ExtractorOutput",
    "MethodRecord",
    "OutputKind",
    "ScriptTarget",
    "extract",
]
