"""Client for the revaultd vault wallet daemon."""
