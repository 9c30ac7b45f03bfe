"""swgraphs.adapters: bridges to third-party graph libraries (optional dependencies)."""
