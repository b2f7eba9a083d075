"""HTTP and GraphQL surface of the walking backend."""
