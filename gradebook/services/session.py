"""
Session handling: registration, login and the menu the logged-in referent sees.
"""

import logging
import random
from typing import List, Optional

from ..config import AppConfig
from ..core.entities import Referent
from ..core.enums import EntityType, MenuState, REFERENT_ID_MIN, REFERENT_ID_MAX
from ..core.exceptions import AuthenticationError, DuplicateEntityError
from ..core.queries import find_referent

logger = logging.getLogger(__name__)


class ApplicationContext:
    """
    Owns every registered referent for the lifetime of the process and
    tracks who is logged in.

    Collaborators (registration, login and report flows) receive the context
    instead of reaching for process-wide lists.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self._referents: List[Referent] = []
        self._current: Optional[Referent] = None
        self._menu_state = MenuState.DEFAULT
        self._random = random.Random(self._config.random_seed)

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def referents(self) -> List[Referent]:
        return self._referents.copy()

    @property
    def current_referent(self) -> Optional[Referent]:
        return self._current

    @property
    def menu_state(self) -> MenuState:
        return self._menu_state

    def require_referent(self) -> Referent:
        """Return the logged-in referent or raise AuthenticationError."""
        if self._current is None:
            raise AuthenticationError("Nobody is logged in!", error_code="not_logged_in")
        return self._current

    def suggest_referent_id(self) -> str:
        """A random ID used to prefill the registration form."""
        return str(self._random.randint(REFERENT_ID_MIN, REFERENT_ID_MAX))

    def register(self, referent: Referent) -> Referent:
        """Add a fully applied referent and log them in."""
        if referent in self._referents:
            logger.info("Registration rejected, ID %s is taken", referent.id)
            raise DuplicateEntityError(
                "A referent with this ID already exists!",
                error_code="duplicate_entity",
                details={'entity': EntityType.REFERENT.value, 'key': referent.id},
            )
        self._referents.append(referent)
        logger.info("Registered referent %s", referent.id)
        self._log_in(referent)
        return referent

    def login(self, referent_id: str, password: str) -> Referent:
        referent = find_referent(referent_id, self._referents)
        if referent is None or not referent.is_matching_password(password):
            logger.warning("Failed login for ID %r", referent_id)
            raise AuthenticationError("ID or password is wrong!", error_code="login_failed")
        self._log_in(referent)
        return referent

    def _log_in(self, referent: Referent) -> None:
        self._current = referent
        self._menu_state = MenuState.LOGGED_IN
        logger.info("Referent %s logged in", referent.id)

    def logoff(self) -> None:
        if self._current is not None:
            logger.info("Referent %s logged off", self._current.id)
        self._current = None
        self._menu_state = MenuState.DEFAULT

    # Menu availability

    def can_create_student(self) -> bool:
        """Students need at least one course and one year group."""
        referent = self._current
        return referent is not None and bool(referent.courses) and bool(referent.year_groups)

    def can_submit_evaluation(self) -> bool:
        return self.can_create_student() and bool(self._current.students)

    def configuration_completed(self) -> bool:
        """The analysis menu opens once every collection has entries."""
        return self.can_submit_evaluation() and bool(self._current.evaluations)

    def toggle_analysis(self) -> MenuState:
        """Open or close the analysis menu."""
        if self._menu_state == MenuState.LOGGED_IN and self.configuration_completed():
            self._menu_state = MenuState.ANALYSIS
        elif self._menu_state == MenuState.ANALYSIS:
            self._menu_state = MenuState.LOGGED_IN
        return self._menu_state
