from typing import Dict, List, Optional, Tuple

from boolindex.Errors import IndexStateError


class Lexicon:
    def __init__(self):
        self.next_id: int = 0
        self.term_to_id: Dict[str, int] = dict()
        self.terms_list: List[str] = list()
        # occurrences seen, duplicates included. Reporting only
        self.total_terms: int = 0
        self._frozen: Optional[Tuple[str, ...]] = None

    def add(self, term: str) -> int:
        if self._frozen is not None:
            raise IndexStateError("Lexicon is frozen; start a new one to index more documents")

        self.total_terms += 1
        if term in self.term_to_id:
            return self.term_to_id[term]

        term_id = self.next_id
        self.term_to_id[term] = term_id
        self.next_id += 1

        self.terms_list.append(term)
        return term_id

    def get_id(self, term: str) -> Optional[int]:
        return self.term_to_id.get(term)

    def get_term(self, term_id: int) -> Optional[str]:
        if term_id < 0 or term_id >= len(self.terms_list):
            return None
        return self.terms_list[term_id]

    def freeze(self) -> Tuple[str, ...]:
        """
        Seal the lexicon and capture the one enumeration order every later step uses.
        """
        if self._frozen is None:
            self._frozen = tuple(self.terms_list)
        return self._frozen

    @property
    def frozen(self) -> bool:
        return self._frozen is not None

    def terms(self) -> Tuple[str, ...]:
        if self._frozen is not None:
            return self._frozen
        return tuple(self.terms_list)

    def __contains__(self, term) -> bool:
        return term in self.term_to_id

    def __len__(self) -> int:
        return len(self.terms_list)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lexicon):
            return NotImplemented
        return set(self.term_to_id) == set(other.term_to_id)
