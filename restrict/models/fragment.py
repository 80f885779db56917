# restrict/models/fragment.py
"""
Fragments produced by cutting a double-stranded sequence range.

A fragment is held as two lists of cut-space indices, one per strand. The
characters are only looked up when a caller asks for a display projection.
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Iterable

DEFAULT_PLACEHOLDER = '0123456789'
DEFAULT_BLANK = ' '


def placeholder_strand(size: int, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Repeat placeholder text to exactly ``size`` characters"""
    if size <= 0:
        return ''
    repeats = -(-size // len(placeholder))
    return (placeholder * repeats)[:size]


@dataclass(frozen=True)
class DisplayFragment:
    """Aligned text of one fragment; blanks mark where a strand is absent"""
    primary: str
    complement: str

    def stripped(self, blank: str = DEFAULT_BLANK) -> 'DisplayFragment':
        return DisplayFragment(self.primary.replace(blank, ''),
                               self.complement.replace(blank, ''))


class DisplayFragments(list):
    """List of DisplayFragment with report-style projections"""

    def __init__(self, iterable: Iterable[DisplayFragment] = (), blank: str = DEFAULT_BLANK):
        super().__init__(iterable)
        self.blank = blank

    def unique(self) -> 'DisplayFragments':
        """Drop repeated (primary, complement) pairs, keeping first occurrence"""
        seen = set()
        result = DisplayFragments(blank=self.blank)
        for display_fragment in self:
            key = (display_fragment.primary, display_fragment.complement)
            if key not in seen:
                seen.add(key)
                result.append(display_fragment)
        return result

    @property
    def primary(self) -> List[str]:
        return sorted(df.primary.replace(self.blank, '') for df in self.unique())

    @property
    def complement(self) -> List[str]:
        return sorted(df.complement.replace(self.blank, '') for df in self.unique())


@dataclass
class Fragment:
    """One contiguous piece of the cut molecule.

    ``primary_bin`` and ``complement_bin`` list the cut-space indices each
    strand contributes. ``order`` fixes the sequence in which indices are
    displayed (walk order on a circular molecule); it defaults to ascending.
    """
    primary_bin: List[int]
    complement_bin: List[int]
    tags: Dict[int, Any] = field(default_factory=dict)
    order: Optional[List[int]] = None

    def __post_init__(self):
        if self.order is None:
            self.order = sorted(set(self.primary_bin) | set(self.complement_bin))

    @property
    def indices(self) -> List[int]:
        return list(self.order)

    @property
    def size(self) -> int:
        return len(self.order)

    @property
    def is_single_stranded(self) -> bool:
        return not self.primary_bin or not self.complement_bin

    def for_display(self, p_str: str, c_str: str, offset: int = 0,
                    blank: str = DEFAULT_BLANK) -> DisplayFragment:
        """Project the fragment onto the two strand strings

        Args:
            p_str: Primary strand text covering the whole range
            c_str: Complementary strand text covering the whole range
            offset: Cut-space index of the first character of each string
            blank: Character used where a strand does not take part

        Returns:
            DisplayFragment with both strands aligned on the same indices
        """
        primary = set(self.primary_bin)
        complement = set(self.complement_bin)
        p_chars = []
        c_chars = []
        for idx in self.order:
            p_chars.append(p_str[idx - offset] if idx in primary else blank)
            c_chars.append(c_str[idx - offset] if idx in complement else blank)
        return DisplayFragment(''.join(p_chars), ''.join(c_chars))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'primary_bin': list(self.primary_bin),
            'complement_bin': list(self.complement_bin),
            'tags': dict(self.tags),
        }


class Fragments(list):
    """Ordered fragments of one sequence range.

    ``primary_strand`` and ``complement_strand`` hold the text used for
    display projections. When unset, a numbered placeholder of the range's
    size stands in so the fragment boundaries can be read off directly.
    """

    def __init__(self, iterable: Iterable[Fragment] = (),
                 primary_strand: Optional[str] = None,
                 complement_strand: Optional[str] = None,
                 offset: int = 0,
                 size: Optional[int] = None,
                 placeholder: str = DEFAULT_PLACEHOLDER,
                 blank: str = DEFAULT_BLANK):
        super().__init__(iterable)
        self.offset = offset
        self.size = size
        self.placeholder = placeholder
        self.blank = blank
        self._primary_strand = primary_strand
        self._complement_strand = complement_strand

    def _default_strand(self) -> str:
        size = self.size
        if size is None:
            size = max((max(f.order) for f in self if f.order), default=self.offset - 1) - self.offset + 1
        return placeholder_strand(size, self.placeholder)

    @property
    def primary_strand(self) -> str:
        if self._primary_strand is None:
            return self._default_strand()
        return self._primary_strand

    @primary_strand.setter
    def primary_strand(self, value: Optional[str]) -> None:
        self._primary_strand = None if value is None else str(value)

    @property
    def complement_strand(self) -> str:
        if self._complement_strand is None:
            return self._default_strand()
        return self._complement_strand

    @complement_strand.setter
    def complement_strand(self, value: Optional[str]) -> None:
        self._complement_strand = None if value is None else str(value)

    def for_display(self, p_str: Optional[str] = None, c_str: Optional[str] = None) -> DisplayFragments:
        p_str = self.primary_strand if p_str is None else p_str
        c_str = self.complement_strand if c_str is None else c_str
        return DisplayFragments(
            (fragment.for_display(p_str, c_str, self.offset, self.blank) for fragment in self),
            blank=self.blank
        )

    @property
    def primary(self) -> List[str]:
        return self.for_display().primary

    @property
    def complement(self) -> List[str]:
        return self.for_display().complement

    def to_records(self) -> List[Dict[str, Any]]:
        """Flatten to one row per fragment for tabular output"""
        records = []
        for number, (fragment, display) in enumerate(zip(self, self.for_display()), start=1):
            records.append({
                'fragment': number,
                'start': fragment.order[0] if fragment.order else None,
                'end': fragment.order[-1] if fragment.order else None,
                'primary': display.primary,
                'complement': display.complement,
                'single_stranded': fragment.is_single_stranded,
                'tags': ';'.join(f"{idx}:{info}" for idx, info in sorted(fragment.tags.items())),
            })
        return records
