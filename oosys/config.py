"""
oosys configuration.
"""


def get(name, default=None):
    return globals().get(name, default)


# maximum number of levels followed along super links.
# The super relation must be acyclic; deeper chains raise ChainTooDeep.
max_depth = 1000

# width of the name column in inspect reports
pad_width = 16

# callable used to render values in inspect reports. None means utils.prepr.
report_formatter = None
