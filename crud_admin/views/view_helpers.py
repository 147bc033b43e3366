"""Helper object available in every admin template as ``h``.

Example (Jinja2):
    <a class="button is-primary" href="{{ h.new_record_url(resource) }}">New</a>
"""

from collections.abc import Mapping, Sequence
from typing import Any

from crud_admin.config import AdminSettings
from crud_admin.models.base_models import AssetOptions, Branding
from crud_admin.protocols import RecordProtocol, ResourceProtocol
from crud_admin.utils.date_format import format_timestamp
from crud_admin.utils.pagination import Pagination, paginate


def query_value(value: Any) -> str:
    """Render a scalar the way it appears in admin query strings.

    Booleans are lowercase and integral floats drop the ".0", so links built
    here match the ones the frontend builds.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class ViewHelpers:
    """Builds admin URLs and formats values for templates.

    Holds a frozen AdminSettings snapshot and no other state, so one instance
    is shared by all requests.
    """

    def __init__(self, settings: AdminSettings):
        self._settings = settings

    @property
    def settings(self) -> AdminSettings:
        return self._settings

    @property
    def branding(self) -> Branding:
        """Branding options passed by the user."""
        return self._settings.branding

    @property
    def custom_assets(self) -> AssetOptions:
        """Custom stylesheets and scripts passed by the user."""
        return self._settings.assets

    def get_query_param_path(self, query: Mapping[str, Any], key: str) -> str:
        """Return the query string fragment for a single key.

        Nested mappings are flattened recursively. The parent key is not
        carried into the nested fragment: {"filters": {"name": "a"}} gives
        "name=a". Lists flatten by index.
        """
        value = query[key]
        if isinstance(value, Mapping):
            return self.get_query_path(value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return self.get_query_path({str(index): item for index, item in enumerate(value)})
        return f"{key}={query_value(value)}"

    def get_query_path(self, query: Mapping[str, Any]) -> str:
        """Return a query string built from every truthy value in ``query``.

        Keys keep their insertion order. Values are not percent-encoded.
        """
        query_path = [self.get_query_param_path(query, key) for key in query if query[key]]
        return "&".join(query_path)

    def url_builder(self, paths: Sequence[str], query: Mapping[str, Any] | None = None) -> str:
        """Join the root path and ``paths`` with "/" and append the query string.

        Args:
            paths: URL path segments
            query: Query parameters; when given, "?" is always appended even if
                every value is falsy

        Returns:
            Absolute admin path
        """
        url = f"{self._settings.root_path}/{'/'.join(str(path) for path in paths)}"
        if query is not None:
            url = f"{url}?{self.get_query_path(query)}"
        return url

    def login_url(self) -> str:
        return self._settings.login_path

    def logout_url(self) -> str:
        return self._settings.logout_path

    def dashboard_url(self) -> str:
        return self._settings.root_path or "/"

    def list_url(self, resource: ResourceProtocol, query: Mapping[str, Any] | None = None) -> str:
        """Return URL for the list view of ``resource``."""
        return self.url_builder(["resources", resource.id], query)

    def new_record_url(self, resource: ResourceProtocol) -> str:
        """Return URL for the `new` view of ``resource``."""
        return self.url_builder(["resources", resource.id, "new"])

    def show_record_url(self, resource: ResourceProtocol, record: RecordProtocol) -> str:
        """Return URL for the show view of ``record``."""
        return self.url_builder(["resources", resource.id, record.id])

    def edit_record_url(self, resource: ResourceProtocol, record: RecordProtocol) -> str:
        """Return URL for the edit view of ``record``."""
        return self.url_builder(["resources", resource.id, record.id, "edit"])

    def delete_record_url(self, resource: ResourceProtocol, record: RecordProtocol) -> str:
        """Return URL for the delete action of ``record``."""
        return self.url_builder(["resources", resource.id, record.id, "delete"])

    def custom_record_action_url(self, resource: ResourceProtocol, record: RecordProtocol, action_id: str) -> str:
        """Return URL for a custom record action defined on the resource.

        Args:
            resource: Resource the record belongs to
            record: Target record
            action_id: Id of the action

        Returns:
            Action URL
        """
        return self.url_builder(["resources", resource.id, record.id, action_id])

    def asset_path(self, asset: str) -> str:
        """Return absolute path to a bundled frontend asset."""
        return self.url_builder(["frontend", "assets", asset])

    def paginate(
        self,
        total_items: int,
        current_page: int = 1,
        page_size: int | None = None,
        max_pages: int = 10,
    ) -> Pagination:
        """Return the page window for a list view.

        Page links are built with ``list_url(resource, {"page": n})``.
        """
        return paginate(total_items, current_page, page_size or self._settings.per_page, max_pages)

    def format_date(self, value: Any, pattern: str | None = None) -> str:
        """Format a raw record value as a timestamp.

        Args:
            value: Raw record value
            pattern: strftime pattern (defaults to the configured datetime format)

        Returns:
            Formatted timestamp or "Invalid date"
        """
        return format_timestamp(value, pattern or self._settings.datetime_format)
