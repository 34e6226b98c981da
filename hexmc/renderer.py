from hexmc.codec import to_hex


class AsciiRenderer:
    # Format:
    #  . - . - .
    #   \ / \ / \
    #    . - . - .
    #     \ / \ / \
    #      . - . - .

    def render(self, board):
        lines = ["   ".join(to_hex(column) for column in range(board.columns))]

        for row in range(board.rows):
            indent = row * 2
            tiles = " - ".join(board[row * board.columns + column].team.value for column in range(board.columns))
            lines.append(" " * indent + tiles + " " + to_hex(row))

            if row == board.rows - 1:
                break   # no connections below the last row

            lines.append(" " * (indent + 1) + "\\ / " * (board.columns - 1) + "\\")

        return "\n".join(lines)

    def display(self, board):
        print(self.render(board))
