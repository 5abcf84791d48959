"""Hotel guests and their loyalty points."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Guest:
    """A registered hotel guest."""

    id: int
    first_name: str
    last_name: str
    phone: str
    email: str
    passport: int
    date: str
    loyal_points: int = 0

    def full_name(self) -> str:
        """First and last name joined together as stored."""
        return self.first_name + self.last_name

    def add_loyalty_points(self, points: int) -> None:
        """Credit the guest with loyalty points."""
        if points < 0:
            raise ValueError("loyalty points cannot be negative")
        self.loyal_points += points

    def info(self) -> str:
        """A printable card describing the guest."""
        lines = [
            f"ID: {self.id}",
            f"Имя: {self.first_name}",
            f"Фамилия: {self.last_name}",
            f"Номер телефона: {self.phone}",
            f"Email: {self.email}",
            f"Номер паспорта: {self.passport}",
            f"Дата рождения: {self.date}",
            f"Бонусы: {self.loyal_points}",
        ]
        return "\n".join(lines) + "\n\n"

    def show_info(self, stream: TextIO | None = None) -> None:
        """Write the guest's card to a stream, standard output by default."""
        (stream or sys.stdout).write(self.info())