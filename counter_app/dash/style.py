from counter_app.models import Color


class AttrDict(dict):
    def __getattr__(self, key):
        return self[key]

    def __setattr__(self, key, value):
        self[key] = value


STYLE = AttrDict(
    text_fontsize="24px",
    text_fontfamily="Avenir",
    value_fontsize="48px",
    margin_side="20px",
)

# fallbacks for when the theme variables are not defined
PALETTE = AttrDict(
    warningOrange="#ffa41c",
    dangerRed="#f2545b",
    electricGreen="#4cd964",
    futureBlue="#41b6e6",
    wonderPurple="#1e407c",
)


def update_style(new_style):
    for key, value in new_style.items():
        STYLE[key] = value


def css_color(color):
    color = Color(color)
    return f"var(--ddd-theme-default-{color.value}, {PALETTE[color.value]})"
