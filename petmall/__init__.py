"""PetMall catalog and wishlist service."""
