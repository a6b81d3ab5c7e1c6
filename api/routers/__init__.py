"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- movies: TMDB catalog proxy
- reviews: Review CRUD with ownership checks
- users: Profile lookup and upsert
- health: Liveness probe
"""
