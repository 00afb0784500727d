"""Theme valuation over snapshot override tables."""

import dataclasses
from typing import List, Sequence

from xcode_color_sets.core.models import Token, TokenTheme


class OverrideThemeValuator:
    """TokenValuator applying each theme's per-token overrides in order.

    Later themes take precedence over earlier ones. Tokens a theme does not
    override keep their own value.
    """

    def apply_themes(
        self, tokens: Sequence[Token], themes: Sequence[TokenTheme]
    ) -> List[Token]:
        themed = []
        for token in tokens:
            value = token.value
            for theme in themes:
                value = theme.overrides.get(token.id, value)
            if value is token.value:
                themed.append(token)
            else:
                themed.append(dataclasses.replace(token, value=value))
        return themed
