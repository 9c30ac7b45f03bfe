"""swgraphs.core: weight matrix store and the two graph variants."""
