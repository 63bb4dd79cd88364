"""Controller for the app search web UI

Handles request parsing, per-client navigation state and rendering. The
search itself is delegated to SearchService.

Term and offset travel in the query string. The last page a client looked
at is also kept in that client's signed session cookie so the /next and
/prev shortcuts work without parameters; nothing is shared between clients.
"""

import logging

from flask import render_template, request, redirect, url_for, session

from db.errors import StoreError
from db.models.search_page import SearchQuery
from db.services.search_service import SearchService
from forms import SearchForm

logger = logging.getLogger(__name__)

SESSION_KEY = "search"


class SearchController:
    """Controller for handling the search UI routes"""

    def __init__(self, search_service=None):
        """Initialize controller with optional service injection

        Args:
            search_service: SearchService instance (or None for default)
        """
        self.search_service = search_service or SearchService()

    @property
    def page_size(self) -> int:
        return self.search_service.config.page_size

    def index(self):
        """Render the empty search page and forget any previous search."""
        session.pop(SESSION_KEY, None)
        return render_template("index.html", search_form=SearchForm(formdata=None))

    def search(self):
        """Render one page of results for ?q=<term>&offset=<n>."""
        search_form = SearchForm(formdata=request.args)
        if not search_form.validate():
            logger.info(f"Rejected search parameters: {search_form.errors}")
            return render_template("index.html", search_form=search_form), 400

        query = SearchQuery.from_raw(search_form.q.data, request.args.get("offset"))
        logger.info(f"Search term is '{query.term}', offset is {query.offset}")

        try:
            page = self.search_service.search(query)
        except StoreError as e:
            logger.error(f"Search failed for '{query.term}' at offset {query.offset}: {e}")
            return render_template("error.html", message="Search is temporarily unavailable."), e.status_code

        session[SESSION_KEY] = {"q": page.query.term, "offset": page.query.offset}

        return render_template(
            "result.html",
            page=page,
            search_form=search_form,
            q=page.query.term,
        )

    def next_page(self):
        """Redirect to the page after the client's current one."""
        return self._step(self.page_size)

    def prev_page(self):
        """Redirect to the page before the client's current one."""
        return self._step(-self.page_size)

    def _step(self, delta: int):
        state = session.get(SESSION_KEY)
        if not state:
            return redirect(url_for("index"))

        # The search service clamps past-the-end offsets; never go below zero here
        offset = max(int(state.get("offset", 0)) + delta, 0)
        return redirect(url_for("search", q=state.get("q", ""), offset=offset))
