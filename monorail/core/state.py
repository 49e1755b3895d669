from __future__ import annotations

from enum import Enum


class Player(Enum):
    YEON_SEUNG = "yeon_seung"
    JUN_SEOK = "jun_seok"

    def opponent(self) -> "Player":
        if self is Player.YEON_SEUNG:
            return Player.JUN_SEOK
        return Player.YEON_SEUNG

    def winning_outcome(self) -> "Outcome":
        if self is Player.YEON_SEUNG:
            return Outcome.YEON_SEUNG_WIN
        return Outcome.JUN_SEOK_WIN


class Outcome(Enum):
    JUN_SEOK_WIN = "jun_seok_win"
    YEON_SEUNG_WIN = "yeon_seung_win"

    def winner(self) -> Player:
        if self is Outcome.YEON_SEUNG_WIN:
            return Player.YEON_SEUNG
        return Player.JUN_SEOK
