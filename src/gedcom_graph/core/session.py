from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from gedcom_graph.config import get_config
from gedcom_graph.core.exceptions import GedcomGraphError
from gedcom_graph.dates import DateContext
from gedcom_graph.logging import get_logger
from gedcom_graph.models.entities import Individual
from gedcom_graph.models.graph import GenealogyGraph
from gedcom_graph.parser_core import GEDCOMParser

log = get_logger(__name__)


class GedcomSession:
    """
    Owner of the loaded graph, the navigation position and the date context.

    Navigation is tracked by individual id, never by object, so a reload
    cannot leave anyone holding records from the discarded graph: callers
    re-fetch through ``graph`` or ``current_individual``.
    """

    def __init__(self, config=None) -> None:
        self.config = config if config is not None else get_config()
        self.date_context = DateContext()
        self.path: Optional[Path] = None
        self.graph: Optional[GenealogyGraph] = None
        self.current_id: Optional[str] = None
        self.history: List[Optional[str]] = []

    def _parse(self, path: Path) -> GenealogyGraph:
        return GEDCOMParser(config=self.config).run(path)

    def load(self, path: Union[str, Path]) -> GenealogyGraph:
        source = Path(path)
        graph = self._parse(source)

        self.path = source
        self.graph = graph
        self._reset_navigation()
        return graph

    def reload(self) -> GenealogyGraph:
        """
        Re-parse the current file and swap in the new graph.

        The old graph stays in place if parsing fails.
        """
        if self.path is None:
            raise GedcomGraphError("No file loaded")

        log.info(f"Reloading GEDCOM file: {self.path}")
        graph = self._parse(self.path)

        self.graph = graph
        self._reset_navigation()
        log.info(
            f"Reloaded {len(graph.individuals)} individuals and {len(graph.families)} families"
        )
        return graph

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def _reset_navigation(self) -> None:
        self.current_id = None
        self.history.clear()

    @property
    def current_individual(self) -> Optional[Individual]:
        if self.graph is None:
            return None
        return self.graph.get_individual(self.current_id)

    def navigate_to(self, individual_id: str) -> Optional[Individual]:
        if self.graph is None:
            return None
        individual = self.graph.get_individual(individual_id)
        if individual is not None:
            self.history.append(self.current_id)
            self.current_id = individual.id
        return individual

    def navigate_back(self) -> bool:
        if not self.history:
            return False
        self.current_id = self.history.pop()
        return True
