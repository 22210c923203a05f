import logging
import sys


def format_info(depth, score, nodes, elapsed, best_move, INF):
    """Engine-protocol style summary of one finished search."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    if abs(score) >= INF:
        score_str = f"win {'white' if score > 0 else 'black'}"
    else:
        score_str = f"cp {score}"
    move_str = best_move.notation() if best_move else "-"
    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {move_str}"


def setup_logger(level: str = "INFO", name: str = "checkers") -> logging.Logger:
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
