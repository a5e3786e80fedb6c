"""Price tables and the shop that trades against them."""
