"""Terminal rendering of ServiceResult (Rich or JSON)."""
