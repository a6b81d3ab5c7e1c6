"""Movie review backend: TMDB proxy and Firestore-backed review/user storage."""
