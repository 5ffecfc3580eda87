from npuzzle.engine.gamegenerator.generator import GameGenerator, shuffle

__all__ = ["GameGenerator", "shuffle"]
