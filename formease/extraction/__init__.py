from formease.extraction.base import BaseExtractor
from formease.extraction.extractor import Extractor
from formease.extraction.factory import ExtractorFactory
from formease.extraction.flow import extract_details

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory", "extract_details"]
