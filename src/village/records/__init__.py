"""Record shapes, entity descriptors and the partial-update merger."""
