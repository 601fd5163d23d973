"""Dataframe pipelines built on the indexed structures."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import ftfy
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .structures import DisjointSet, FenwickTree


@dataclass
class ComponentsStats:
    """Summary metrics for a connected components run."""

    total_edges: int
    total_labels: int
    merges: int
    redundant_edges: int
    component_count: int
    largest_component: int
    runtime_seconds: float


@dataclass
class ComponentsResult:
    """Result bundle returned by :class:ComponentsPipeline."""

    dataframe: pd.DataFrame
    components: Dict[int, List[str]]
    stats: ComponentsStats


@dataclass
class ComponentsConfig:
    """Configuration parameters for :class:ComponentsPipeline."""

    left_column: str = "source"
    right_column: str = "target"
    normalize_labels: bool = True
    use_tqdm: bool | None = None
    verbose: bool = True


@dataclass
class PrefixSumConfig:
    """Configuration parameters for :class:PrefixSumPipeline."""

    value_column: str = "value"
    output_column: str = "prefix_sum"
    verbose: bool = True


def clean_label(label: object) -> str:
    """Return `label` with encoding damage repaired and whitespace collapsed."""

    raw = "" if _is_missing(label) else str(label)
    return " ".join(ftfy.fix_text(raw).split())


def _is_missing(label: object) -> bool:
    return label is None or (not isinstance(label, str) and bool(pd.isna(label)))


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        return value.strip() or None
    return value


class ComponentsPipeline:
    """Group the labels of an edge list into connected components."""

    def __init__(self, config: ComponentsConfig | None = None) -> None:
        self.config = config or ComponentsConfig()

    def run(
        self,
        edges: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> ComponentsResult:
        """Union every edge, optionally save the labelled nodes, and return them."""

        for column in (self.config.left_column, self.config.right_column):
            if column not in edges.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Connected Components Started ---")
            print("\n1. Collecting labels...")

        t0 = time.time()
        pairs = self._label_pairs(edges)
        index_of: Dict[str, int] = {}
        for left, right in pairs:
            index_of.setdefault(left, len(index_of))
            index_of.setdefault(right, len(index_of))
        labels = list(index_of)
        if verbose:
            print(f"   Found {len(labels)} labels across {len(pairs)} edges. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Merging edges...")
        components = DisjointSet(len(labels))
        merges = 0
        iterator: Iterable[Tuple[str, str]] = pairs
        if pairs and self._use_tqdm:
            iterator = tqdm(pairs, desc="   Merging Edges", unit="edge")
        for left, right in iterator:
            if components.union(index_of[left], index_of[right]):
                merges += 1
        if verbose:
            print(f"   {merges} merges, {len(pairs) - merges} redundant edges. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Assigning component ids...")
        # groups() iterates indices in order, so roots appear by smallest member
        groups = components.groups()
        component_of_root = {root: cid for cid, root in enumerate(groups)}
        component_ids = [component_of_root[components.find(i)] for i in range(len(labels))]
        df = pd.DataFrame(
            {
                "label": labels,
                "component_id": component_ids,
                "component_size": [components.set_size(i) for i in range(len(labels))],
            }
        )
        component_map = {
            component_of_root[root]: [labels[i] for i in members] for root, members in groups.items()
        }
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            save_dataframe(df, output_path)
            if verbose:
                print(f"\n   Results saved to '{output_path}'")

        elapsed = time.time() - overall_start_time
        stats = ComponentsStats(
            total_edges=len(pairs),
            total_labels=len(labels),
            merges=merges,
            redundant_edges=len(pairs) - merges,
            component_count=len(component_map),
            largest_component=max((len(m) for m in component_map.values()), default=0),
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Labels processed: {stats.total_labels}")
            print(f"   - Components found: {stats.component_count}")
            print(f"   - Largest component: {stats.largest_component}")
            print(f"\n--- Connected Components Finished in {elapsed:.2f} seconds ---")

        return ComponentsResult(dataframe=df, components=component_map, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _label_pairs(self, edges: pd.DataFrame) -> List[Tuple[str, str]]:
        lefts = edges[self.config.left_column].tolist()
        rights = edges[self.config.right_column].tolist()
        if self.config.normalize_labels:
            lefts = [clean_label(label) for label in lefts]
            rights = [clean_label(label) for label in rights]
        else:
            lefts = ["" if _is_missing(label) else str(label) for label in lefts]
            rights = ["" if _is_missing(label) else str(label) for label in rights]
        return [(left, right) for left, right in zip(lefts, rights) if left.strip() and right.strip()]


class PrefixSumPipeline:
    """Annotate a numeric column with its running totals."""

    def __init__(self, config: PrefixSumConfig | None = None) -> None:
        self.config = config or PrefixSumConfig()

    def run(self, dataframe: pd.DataFrame, output_path: str | Path | None = None) -> pd.DataFrame:
        column = self.config.value_column
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

        t0 = time.time()
        series = dataframe[column]
        if not pd.api.types.is_numeric_dtype(series):
            series = series.map(_blank_to_none)
        try:
            values = pd.to_numeric(series, errors="raise").fillna(0)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Column '{column}' contains non-numeric values") from exc

        totals = FenwickTree(values.tolist())
        df = dataframe.copy()
        df[self.config.output_column] = [totals.prefix_sum(i) for i in range(len(totals))]
        if self.config.verbose:
            print(f"   Computed {len(totals)} prefix sums over '{column}' in {time.time() - t0:.2f}s")

        if output_path is not None:
            save_dataframe(df, output_path)
        return df


def save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix == ".xlsx":
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "ComponentsConfig",
    "ComponentsPipeline",
    "ComponentsResult",
    "ComponentsStats",
    "PrefixSumConfig",
    "PrefixSumPipeline",
    "clean_label",
    "save_dataframe",
]
