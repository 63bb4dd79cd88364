from controllers.search_controller import SearchController


def init_routes(app, search_service=None):
    """Initialize all Flask routes using MVC pattern"""

    search_controller = SearchController(search_service=search_service)

    @app.route("/", methods=["GET"])
    def index():
        """Empty search page"""
        return search_controller.index()

    @app.route("/search", methods=["GET"])
    def search():
        """One page of results for ?q=&offset="""
        return search_controller.search()

    @app.route("/next", methods=["GET"])
    def next_page():
        """Advance this client's search by one page"""
        return search_controller.next_page()

    @app.route("/prev", methods=["GET"])
    def prev_page():
        """Step this client's search back one page"""
        return search_controller.prev_page()

    return search_controller
