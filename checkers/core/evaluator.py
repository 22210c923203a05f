from checkers.config import CONFIG
from checkers.core.board import BOARD_SIZE, Board, Piece


class Evaluator:
    def __init__(self, cfg=None):
        self.cfg = cfg or CONFIG.eval

    def evaluate(self, board: Board) -> int:
        """Static score, positive favours White. Material plus a row term for men."""
        man = self.cfg.man_value
        king = self.cfg.king_value
        bonus = self.cfg.advance_bonus

        score = 0
        for row, pieces in enumerate(board.squares):
            for piece in pieces:
                if piece == Piece.WHITE_MAN:
                    score += man + bonus * row
                elif piece == Piece.WHITE_KING:
                    score += king
                elif piece == Piece.BLACK_MAN:
                    score -= man + bonus * (BOARD_SIZE - 1 - row)
                elif piece == Piece.BLACK_KING:
                    score -= king
        return score
