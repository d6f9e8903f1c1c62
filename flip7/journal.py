from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .models import Event, EventKind, Player

LOGGER = logging.getLogger("flip7.journal")

# The journal is the engine's only event sink. It keeps the whole game as one
# document so it can be dumped after every round.


class Journal:
    def __init__(self) -> None:
        self.data: Dict[str, List[Dict[str, object]]] = {"rounds": []}
        self.events: List[Event] = []
        self.current: Optional[Dict[str, object]] = None

    def start_round(self, round_number: int, players: Sequence[Player]) -> None:
        if self.current is not None:
            raise RuntimeError("Previous round was not closed")
        self.current = {
            "round": round_number,
            "players": [player.name for player in players],
            "events": [],
            "scores": {},
        }
        self.events.append(
            Event(EventKind.ROUND_START, payload={"round": round_number, "players": self.current["players"]})
        )

    def log(self, event: Event) -> None:
        if self.current is None:
            raise RuntimeError("No round in progress")
        self.events.append(event)
        self.current["events"].append(event.to_dict())  # type: ignore[union-attr]

    def end_round(self, players: Sequence[Player]) -> None:
        if self.current is None:
            raise RuntimeError("No round in progress")
        scores = {player.name: player.total_score for player in players}
        self.current["scores"] = scores
        self.data["rounds"].append(self.current)
        self.events.append(Event(EventKind.ROUND_END, payload={"round": self.current["round"], "scores": scores}))
        self.current = None
        self.flush()

    def abort_round(self) -> None:
        # The unfinished round never reaches the document.
        if self.current is not None:
            LOGGER.warning("Round %s aborted before scoring", self.current["round"])
        self.current = None

    def events_of(self, kind: EventKind) -> List[Event]:
        return [event for event in self.events if event.kind == kind]

    def flush(self) -> None:
        pass


class JsonJournal(Journal):
    """Rewrites ``<log_dir>/game-<timestamp>.json`` after every completed round."""

    def __init__(self, log_dir: str = "logs", now: Optional[datetime] = None) -> None:
        super().__init__()
        stamp = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H-%M-%S-%fZ")
        self.path = Path(log_dir) / f"game-{stamp}.json"

    def flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
        LOGGER.debug("Journal written to %s", self.path)
