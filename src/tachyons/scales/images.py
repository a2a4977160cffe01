images = {
    "rm-contain": {"resizeMode": "contain"},
    "rm-cover": {"resizeMode": "cover"},
    "rm-stretch": {"resizeMode": "stretch"},
    "rm-center": {"resizeMode": "center"},
    "rm-repeat": {"resizeMode": "repeat"},
}
