# Folder in charge of TMDB API interactions
