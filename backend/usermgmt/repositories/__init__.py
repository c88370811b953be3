"""
Repositories

Storage adapters behind the UserRepository contract. Services only talk to
the abstract interface, so any adapter can back them.
"""
