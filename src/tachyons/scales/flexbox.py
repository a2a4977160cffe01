flexbox = {
    "flx-i": {"flex": 1},
    "flx-row": {"flexDirection": "row"},
    "flx-row-reverse": {"flexDirection": "row-reverse"},
    "flx-col-reverse": {"flexDirection": "column-reverse"},
    "flx-wrap": {"flexWrap": "wrap"},
    "flx-nowrap": {"flexWrap": "nowrap"},
    "aifs": {"alignItems": "flex-start"},
    "aife": {"alignItems": "flex-end"},
    "aic": {"alignItems": "center"},
    "aib": {"alignItems": "baseline"},
    "ais": {"alignItems": "stretch"},
    "asfs": {"alignSelf": "flex-start"},
    "asfe": {"alignSelf": "flex-end"},
    "asc": {"alignSelf": "center"},
    "asb": {"alignSelf": "baseline"},
    "ass": {"alignSelf": "stretch"},
    "jcfs": {"justifyContent": "flex-start"},
    "jcfe": {"justifyContent": "flex-end"},
    "jcc": {"justifyContent": "center"},
    "jcsb": {"justifyContent": "space-between"},
    "jcsa": {"justifyContent": "space-around"},
    "acfs": {"alignContent": "flex-start"},
    "acfe": {"alignContent": "flex-end"},
    "acc": {"alignContent": "center"},
    "acsb": {"alignContent": "space-between"},
    "acsa": {"alignContent": "space-around"},
    "acs": {"alignContent": "stretch"},
}
