"""
facetlens – faceted-search view-model library.

Import path convention::

    from facetlens.application.search import FieldResolver, build_filters
    from facetlens.application.search import FacetViewModel, SortViewModel
    from facetlens.config import SearchSettings, SettingsFactory
    from facetlens.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
