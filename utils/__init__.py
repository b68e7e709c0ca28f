# DEPENDENCIES
from .text_processor import TextProcessor
from .validators import ContractValidator
from .logger import ContractAnalyzerLogger
from .document_reader import DocumentReader
from .document_reader import DocumentReadError


__all__ = ['DocumentReader',
           'TextProcessor',
           'DocumentReadError',
           'ContractValidator',
           'ContractAnalyzerLogger',
          ]
