"""Calendar provider clients."""
