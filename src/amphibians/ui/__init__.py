"""UI layer: state union, observable holder, and the view model.

Public API:
  - state: AmphibianUiState, Loading, Success, Error
  - observable: StateFlow, ReadOnlyStateFlow
  - viewmodel: AmphibianViewModel
"""

from amphibians.ui.observable import ReadOnlyStateFlow, StateFlow
from amphibians.ui.state import AmphibianUiState, Error, Loading, Success
from amphibians.ui.viewmodel import AmphibianViewModel

__all__ = [
    "AmphibianUiState",
    "AmphibianViewModel",
    "Error",
    "Loading",
    "ReadOnlyStateFlow",
    "StateFlow",
    "Success",
]
