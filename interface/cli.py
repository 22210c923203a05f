from checkers.config import CONFIG
from checkers.core.board import Side
from checkers.core.utils import setup_logger
from checkers.main import Engine


def main(input_fn=input):
    setup_logger(CONFIG.log_level)
    engine = Engine()
    human = Side(CONFIG.ui.human_side)

    while not engine.is_game_over():
        engine.print_board()
        print("----------------------------")

        if engine.turn is human:
            user_move = input_fn(f"Your move as {human.value.lower()} (e.g. 52-43, 'moves', 'quit'): ").strip()
            if user_move == "quit":
                return None
            if user_move == "moves":
                print(" ".join(engine.get_legal_moves()))
                continue
            if not engine.make_move(user_move):
                print("Illegal move, try again.")
        else:
            move = engine.play_engine_move()
            print(f"Engine plays: {move}")

    engine.print_board()
    won = engine.winner()
    print("Game Over")
    print(f"Winner: {won.value}")
    return won


if __name__ == "__main__":
    main()
