"""HTTP surface for the village record stores."""
