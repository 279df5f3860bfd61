"""Risk/return estimation for artist investment deals."""
