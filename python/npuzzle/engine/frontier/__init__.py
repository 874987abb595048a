from npuzzle.engine.frontier.queue import MinPQ

__all__ = ["MinPQ"]
