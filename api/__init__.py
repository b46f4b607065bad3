"""REST and RPC front-ends."""
