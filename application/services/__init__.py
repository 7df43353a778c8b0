from .best_conversion import find_best_conversions
from .conversion_service import ConversionService

__all__ = ['ConversionService', 'find_best_conversions']
