# restrict/analysis/digest.py
"""
Digest a sequence with a set of enzyme actions.

Actions that cannot interfere with each other always cut. Actions whose
sites overlap another action's cuts may or may not get to cut, depending on
which enzyme acts first, so every ordering of them is tried and the distinct
fragments of all outcomes are reported.
"""
import itertools
import logging
from typing import Dict, List, Sequence, Tuple

from Bio.Seq import Seq

from restrict.exceptions import DigestError, ValidationError
from restrict.config.defaults import DEFAULT_CONFIG
from restrict.core.sequence_range import SequenceRange
from restrict.models.fragment import DisplayFragments
from .enzyme_action import EnzymeAction, find_conflicts


class Digest:
    """Cut one sequence with enzyme actions and collect the fragments"""

    def __init__(self, sequence, actions: Sequence[EnzymeAction], config=None):
        """Initialize with sequence and actions

        Args:
            sequence: Primary strand as str or Bio.Seq.Seq
            actions: Enzyme actions positioned on the sequence
            config: Optional ConfigManager supplying display and digest settings
        """
        self.logger = logging.getLogger("restrict.analysis.digest")

        if not isinstance(sequence, (str, Seq)):
            raise ValidationError(f"Sequence must be a str or Bio.Seq.Seq, got {type(sequence).__name__}")
        for action in actions:
            if not isinstance(action, EnzymeAction):
                raise ValidationError(f"Expected EnzymeAction, got {type(action).__name__}")

        self.sequence = str(sequence)
        self.actions = list(actions)

        if config is not None:
            display = config.get_display_config()
            digest_config = config.get_digest_config()
        else:
            display = DEFAULT_CONFIG['display']
            digest_config = DEFAULT_CONFIG['digest']
        self.max_permutation_actions = digest_config.get(
            'max_permutation_actions', DEFAULT_CONFIG['digest']['max_permutation_actions'])
        self.placeholder = display.get('placeholder', DEFAULT_CONFIG['display']['placeholder'])
        self.blank = display.get('blank', DEFAULT_CONFIG['display']['blank'])

    @property
    def complement(self) -> str:
        """Forward complement of the sequence (not reversed)"""
        return str(Seq(self.sequence).complement())

    def split_actions(self) -> Tuple[List[EnzymeAction], List[EnzymeAction]]:
        """Split actions into (sometimes cut, always cut)"""
        conflicts = find_conflicts(self.actions)
        sometimes = [a for i, a in enumerate(self.actions) if i in conflicts]
        always = [a for i, a in enumerate(self.actions) if i not in conflicts]
        return sometimes, always

    def _new_range(self) -> SequenceRange:
        size = len(self.sequence)
        sequence_range = SequenceRange(0, size - 1, 0, size - 1)
        sequence_range.placeholder = self.placeholder
        sequence_range.blank = self.blank
        return sequence_range

    def _with_strands(self, sequence_range: SequenceRange) -> SequenceRange:
        fragments = sequence_range.fragments
        fragments.primary_strand = self.sequence
        fragments.complement_strand = self.complement
        return sequence_range

    def cut_by_permutation(self) -> Dict[Tuple[int, ...], SequenceRange]:
        """Cut once per ordering of the conflicting actions

        Returns:
            Mapping of ordering (positions in the conflicting list) to the cut
            SequenceRange; a single entry keyed () when nothing conflicts
        """
        if not self.sequence:
            return {}

        sometimes, always = self.split_actions()
        if len(sometimes) > self.max_permutation_actions:
            raise DigestError(
                f"{len(sometimes)} conflicting enzyme actions exceed the limit of "
                f"{self.max_permutation_actions} for permutation",
                {"conflicting": len(sometimes), "limit": self.max_permutation_actions}
            )
        self.logger.debug(f"{len(always)} action(s) always cut, {len(sometimes)} conflict")

        if not sometimes:
            sequence_range = self._new_range()
            for action in always:
                sequence_range.add_cut_ranges(list(action.cut_ranges))
            return {(): self._with_strands(sequence_range)}

        results = {}
        for permutation in itertools.permutations(range(len(sometimes))):
            sequence_range = self._new_range()
            for action in always:
                sequence_range.add_cut_ranges(list(action.cut_ranges))

            previous_cut_ranges = []
            for position in permutation:
                action = sometimes[position]
                if action.destroyed_by(previous_cut_ranges):
                    continue
                sequence_range.add_cut_ranges(list(action.cut_ranges))
                previous_cut_ranges.extend(action.cut_ranges)

            results[permutation] = self._with_strands(sequence_range)
        return results

    def cut(self) -> DisplayFragments:
        """Distinct fragments over every ordering of the conflicting actions"""
        combined = DisplayFragments(blank=self.blank)
        for sequence_range in self.cut_by_permutation().values():
            combined.extend(sequence_range.fragments.for_display())
        return combined.unique()

    def cut_without_permutations(self) -> DisplayFragments:
        """Fragments with every action cutting, regardless of conflicts"""
        if not self.sequence:
            return DisplayFragments(blank=self.blank)
        sequence_range = self._new_range()
        for action in self.actions:
            sequence_range.add_cut_ranges(list(action.cut_ranges))
        return self._with_strands(sequence_range).fragments.for_display().unique()


def digest(sequence, actions: Sequence[EnzymeAction], permutations: bool = True,
           config=None) -> DisplayFragments:
    """Convenience wrapper around Digest"""
    runner = Digest(sequence, actions, config=config)
    if permutations:
        return runner.cut()
    return runner.cut_without_permutations()
