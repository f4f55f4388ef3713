import logging
import math


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_info(d, score, nodes, elapsed, pv_moves, mate_score):
    """UCI-style info line; ``score`` is from White's point of view."""
    pv_str = " ".join([m.uci() for m in pv_moves]) or "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if math.isinf(score):
        score_str = "none"
    elif abs(score) > mate_score - 100:
        mate_in = int(mate_score - abs(score) + 1) // 2
        score_str = f"mate {mate_in if score > 0 else -mate_in}"
    else:
        score_str = f"cp {score:.1f}"

    return f"info depth {d} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {pv_str}"
