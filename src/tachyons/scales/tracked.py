"""Letter spacing, in rem."""

tracked = {
    "tracked": {"letterSpacing": 0.1},
    "tracked-tight": {"letterSpacing": -0.05},
    "tracked-mega": {"letterSpacing": 0.25},
}
