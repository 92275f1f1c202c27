from textual.theme import Theme

# Fusion Light: white panes, same green/red status colours as Fusion Dark
THEMES = [
    Theme(
        name="fusion-light",
        primary="#3B6EA5",
        secondary="#7A8699",
        warning="#B7791F",
        error="#CC0000",
        success="#009900",
        accent="#2B8A9E",
        foreground="#1F2328",
        background="#FFFFFF",
        surface="#F4F5F7",
        panel="#E6E8EB",
        dark=False,
    )
]
