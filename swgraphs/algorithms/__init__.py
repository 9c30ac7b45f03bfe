"""swgraphs.algorithms: neighbor and degree queries mixed into the graph classes."""
