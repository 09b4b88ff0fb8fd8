from listkit.rules.models import Rules


class RulesAdapter:
    """
    Serves loaded rules through the component RulesPort protocols.

    Satisfies both the list utils and the combinatorics ports.
    """

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_equality_mode(self) -> str:
        return self._rules.equality.mode

    def get_max_depth(self) -> int | None:
        return self._rules.flatten.max_depth

    def get_detect_cycles(self) -> bool:
        return self._rules.flatten.detect_cycles

    def get_random_seed(self) -> int | None:
        return self._rules.random.seed
