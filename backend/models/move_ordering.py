from typing import List, Sequence


def order_successors(successors: Sequence, maximize: bool, evaluator) -> List:
    """
    Order successor states strongest first for the side to move.

    The maximizing side gets descending scores, the minimizing side ascending.
    The sort is stable, so equally scored successors keep generator order and
    the search stays deterministic.
    """
    scored = [(evaluator.evaluate(successor), successor) for successor in successors]
    scored.sort(key=lambda item: item[0], reverse=maximize)
    return [successor for _, successor in scored]
