"""IMDb URL templates."""

from urllib.parse import quote

ACTOR_MOVIES_URL = (
    "https://www.imdb.com/filmosearch/?explore=title_type&role={id}&ref_=filmo_nxt"
    "&mode=simple&page={page}&sort={sort},{sort_order}&title_type={title_type}"
)

LIST_URL = "https://www.imdb.com/list/{id}/?sort=list_order,asc&mode=detail&page={page}"


class PageUrl:
    """Builds the URL of page N for one target.

    Named parameters are fixed when the builder is created; only the page
    number varies between calls.
    """

    def __init__(self, template: str, **params: str):
        self.template = template
        self.params = {k: quote(str(v), safe="") for k, v in params.items()}

    def __call__(self, page: int) -> str:
        return self.template.format(page=page, **self.params)

    def __repr__(self):
        return f"PageUrl({self.template!r}, {self.params!r})"
