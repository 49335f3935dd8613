"""Tests for the client-side search/filter/sort projection."""
from collections.abc import Callable

from catalog_client.overrides import LocalOverrides
from catalog_client.projection import (
    ALL_CATEGORIES,
    CatalogStats,
    ProjectionOptions,
    PromptView,
    apply_overrides,
    catalog_stats,
    list_categories,
    matches_query,
    project_prompts,
)

PromptFactory = Callable[..., PromptView]


def _ids(prompts: list[PromptView]) -> list[str]:
    return [p.id for p in prompts]


# =============================================================================
# PromptView Tests
# =============================================================================


def test__prompt_view__from_api_ignores_server_vip_flag() -> None:
    """Test that VIP status is derived from the id, not the sent flag."""
    view = PromptView.from_api({
        "id": "0-Poet", "act": "Poet", "prompt": "Write", "icon": "✍️",
        "category": "Poet", "tags": ["poet"], "isVip": True, "usageCount": 2,
    })

    assert view.is_vip is False
    assert view.usage_count == 2
    assert view.tags == ("poet",)


def test__prompt_view__is_custom() -> None:
    """Test that custom prompts are recognized by their id prefix."""
    assert PromptView(id="custom-1", act="", prompt="", icon="", category="").is_custom
    assert not PromptView(id="0-Poet", act="", prompt="", icon="", category="").is_custom


# =============================================================================
# apply_overrides / matches_query Tests
# =============================================================================


def test__apply_overrides__local_values_replace_server_values(make_prompt: PromptFactory) -> None:
    """Test that overrides win over whatever the catalog carried."""
    prompt = make_prompt("0-Poet", is_favorite=True, usage_count=9)
    overrides = LocalOverrides(favorites=set(), usage_counts={"0-Poet": 3})

    result = apply_overrides(prompt, overrides)

    assert result.is_favorite is False
    assert result.usage_count == 3


def test__matches_query__act_prompt_or_tag(make_prompt: PromptFactory) -> None:
    """Test case-insensitive substring matching over act, prompt and tags."""
    prompt = make_prompt("1", act="Linux Terminal", prompt="Reply with output", tags=("shell",))

    assert matches_query(prompt, "TERMINAL")
    assert matches_query(prompt, "output")
    assert matches_query(prompt, "she")
    assert not matches_query(prompt, "python")


# =============================================================================
# project_prompts Filter Tests
# =============================================================================


def test__project_prompts__no_options_keeps_everything(make_prompt: PromptFactory) -> None:
    """Test that the default projection filters nothing."""
    prompts = [make_prompt("0-A"), make_prompt("1-B")]

    assert _ids(project_prompts(prompts, LocalOverrides())) == ["0-A", "1-B"]


def test__project_prompts__query_filter(make_prompt: PromptFactory) -> None:
    """Test that the search query narrows the list."""
    prompts = [make_prompt("0-Chef", act="Chef"), make_prompt("1-Poet", act="Poet")]

    result = project_prompts(prompts, LocalOverrides(), ProjectionOptions(query="chef"))

    assert _ids(result) == ["0-Chef"]


def test__project_prompts__category_filter_and_all(make_prompt: PromptFactory) -> None:
    """Test that a category narrows the list and "All" does not."""
    prompts = [make_prompt("0-A", category="Linux"), make_prompt("1-B", category="Travel")]

    linux = project_prompts(prompts, LocalOverrides(), ProjectionOptions(category="Linux"))
    everything = project_prompts(prompts, LocalOverrides(), ProjectionOptions(category=ALL_CATEGORIES))

    assert _ids(linux) == ["0-A"]
    assert _ids(everything) == ["0-A", "1-B"]


def test__project_prompts__favorites_only_uses_overrides(make_prompt: PromptFactory) -> None:
    """Test that the favorites filter reads the local override layer."""
    prompts = [make_prompt("0-A", is_favorite=True), make_prompt("1-B")]
    overrides = LocalOverrides(favorites={"1-B"})

    result = project_prompts(prompts, overrides, ProjectionOptions(favorites_only=True))

    assert _ids(result) == ["1-B"]
    assert result[0].is_favorite is True


def test__project_prompts__vip_only(make_prompt: PromptFactory) -> None:
    """Test that the VIP filter keeps only vip- prompts."""
    prompts = [make_prompt("0-A"), make_prompt("vip-x"), make_prompt("custom-1")]

    result = project_prompts(prompts, LocalOverrides(), ProjectionOptions(vip_only=True))

    assert _ids(result) == ["vip-x"]


def test__project_prompts__filters_combine(make_prompt: PromptFactory) -> None:
    """Test that every active filter must pass."""
    prompts = [
        make_prompt("vip-chef", act="Chef", category="Food"),
        make_prompt("0-Chef", act="Chef", category="Food"),
        make_prompt("vip-poet", act="Poet", category="Food"),
    ]
    overrides = LocalOverrides(favorites={"vip-chef", "0-Chef", "vip-poet"})
    options = ProjectionOptions(query="chef", category="Food", favorites_only=True, vip_only=True)

    assert _ids(project_prompts(prompts, overrides, options)) == ["vip-chef"]


# =============================================================================
# project_prompts Sort Tests
# =============================================================================


def test__project_prompts__newest_puts_vip_then_custom_first(make_prompt: PromptFactory) -> None:
    """Test the default order: VIP, then custom, then the rest in catalog order."""
    prompts = [
        make_prompt("0-A"),
        make_prompt("custom-2"),
        make_prompt("1-B"),
        make_prompt("vip-x"),
        make_prompt("custom-1"),
    ]

    result = project_prompts(prompts, LocalOverrides())

    assert _ids(result) == ["vip-x", "custom-2", "custom-1", "0-A", "1-B"]


def test__project_prompts__alpha_vip_first_then_case_insensitive(
    make_prompt: PromptFactory,
) -> None:
    """Test alphabetical order by act with VIP prompts leading."""
    prompts = [
        make_prompt("0-b", act="banana"),
        make_prompt("1-A", act="Apple"),
        make_prompt("vip-z", act="Zebra"),
        make_prompt("2-c", act="cherry"),
    ]

    result = project_prompts(prompts, LocalOverrides(), ProjectionOptions(sort_by="alpha"))

    assert [p.act for p in result] == ["Zebra", "Apple", "banana", "cherry"]


def test__project_prompts__alpha_ties_keep_catalog_order(make_prompt: PromptFactory) -> None:
    """Test that identical acts keep their relative catalog order."""
    prompts = [make_prompt("0-x", act="Poet"), make_prompt("1-x", act="Poet")]

    result = project_prompts(prompts, LocalOverrides(), ProjectionOptions(sort_by="alpha"))

    assert _ids(result) == ["0-x", "1-x"]


def test__project_prompts__usage_ignores_vip(make_prompt: PromptFactory) -> None:
    """Test that usage sort is purely by descending count, VIP or not."""
    prompts = [make_prompt("vip-x"), make_prompt("0-A"), make_prompt("1-B"), make_prompt("2-C")]
    overrides = LocalOverrides(usage_counts={"0-A": 5, "1-B": 9, "vip-x": 1})

    result = project_prompts(prompts, overrides, ProjectionOptions(sort_by="usage"))

    assert _ids(result) == ["1-B", "0-A", "vip-x", "2-C"]


def test__project_prompts__does_not_mutate_inputs(make_prompt: PromptFactory) -> None:
    """Test that projecting leaves the catalog and overrides untouched."""
    prompts = [make_prompt("1-B"), make_prompt("vip-x")]
    overrides = LocalOverrides(favorites={"1-B"})

    first = project_prompts(prompts, overrides)
    second = project_prompts(prompts, overrides)

    assert first == second
    assert _ids(prompts) == ["1-B", "vip-x"]
    assert prompts[0].is_favorite is False


# =============================================================================
# Categories and Stats Tests
# =============================================================================


def test__list_categories__all_first_then_sorted_distinct(make_prompt: PromptFactory) -> None:
    """Test that categories are deduplicated, sorted and led by "All"."""
    prompts = [
        make_prompt("0", category="Linux"),
        make_prompt("1", category="Custom"),
        make_prompt("2", category="Linux"),
    ]

    assert list_categories(prompts) == ["All", "Custom", "Linux"]


def test__list_categories__empty_catalog() -> None:
    """Test that an empty catalog still offers "All"."""
    assert list_categories([]) == ["All"]


def test__catalog_stats__counts_overrides() -> None:
    """Test favorite count and total usage summary."""
    overrides = LocalOverrides(favorites={"a", "b"}, usage_counts={"a": 3, "c": 4})

    assert catalog_stats(overrides) == CatalogStats(favorites=2, total_usage=7)
