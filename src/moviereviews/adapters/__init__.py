# Outbound integrations: the TMDB catalog and the Firestore document store
