"""Qt consumers of the clinic data store."""
