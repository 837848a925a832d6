from backend.engine.search.bfs import BFS, Traversal
from backend.engine.search.dijkstra import Dijkstra
from backend.engine.search.result import MultiPathResult, SearchResult

__all__ = ["BFS", "Dijkstra", "MultiPathResult", "SearchResult", "Traversal"]
