# boolindex/Query.py
"""
QueryProcessor: boolean membership queries over either index.

A query is a flat, whitespace-separated run of terms and the operators
`and`, `or`, `not` (any case). There is no precedence and there are no
parentheses. Two stacks are used, one for operators and one for
document sets:

 - `and` / `or` / `not` are pushed onto the operator stack.
 - A term is looked up. If `not` sits on top of the operator stack it is
   popped and the term's complement against the document universe is
   pushed; otherwise the term's own set is pushed.
 - Once the query is consumed the operator stack is drained from the top:
   `and` intersects and `or` unites the two topmost sets. A `not` that
   was never followed by a term is dropped.

So `not` binds to the next term, and the binary operators apply last to
first: `a and b or c` is `a & (b | c)`.
"""
from typing import FrozenSet, List, Protocol, Set

OPERATORS = ("and", "or", "not")


class DocumentSetResolver(Protocol):
    def lookup(self, term: str) -> FrozenSet: ...

    def universe(self) -> FrozenSet: ...


class QueryProcessor:
    def __init__(self, resolver: DocumentSetResolver):
        # InvertedIndex and TermDocumentMatrix both qualify
        self.resolver = resolver

    def _split_query(self, query: str) -> List[str]:
        if not query:
            return []
        return query.split()

    def _pop(self, stack: List[FrozenSet]) -> FrozenSet:
        # a missing operand counts as no documents
        return stack.pop() if stack else frozenset()

    def evaluate(self, query: str) -> Set:
        """
        Documents matching `query`. Never raises for unknown terms, stray `not`
        or missing operands; the answer is then simply smaller (or empty).
        """
        operators: List[str] = []
        operands: List[FrozenSet] = []

        for token in self._split_query(query):
            word = token.lower()
            if word in OPERATORS:
                operators.append(word)
                continue

            docs = self.resolver.lookup(word)
            if operators and operators[-1] == "not":
                operators.pop()
                operands.append(self.resolver.universe() - docs)
            else:
                operands.append(docs)

        while operators:
            op = operators.pop()
            if op == "and":
                right = self._pop(operands)
                left = self._pop(operands)
                operands.append(left & right)
            elif op == "or":
                right = self._pop(operands)
                left = self._pop(operands)
                operands.append(left | right)
            # leftover `not`: no operand to apply it to

        return set(operands[-1]) if operands else set()
