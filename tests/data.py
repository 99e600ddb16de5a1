""" Configurations and strategies for other tests to use. """
import hypothesis.strategies as st

import printmail

default = printmail.Config()
everything = default._replace(add_side_walls=True, add_support_joiners=True)
tall = default._replace(cols=2, rows=2, stacks=5)

params_configs = [
    default,
    everything,
    tall,
    printmail.Config(cols=1, rows=1, stacks=1),
    printmail.Config(cols=4, rows=2, stacks=3, ring_id=6, wire_d=1),
]

params_empty = [
    printmail.Config(cols=0),
    printmail.Config(rows=0),
    printmail.Config(stacks=0),
    printmail.Config(cols=-2, rows=3, stacks=3),
]

dimensions = st.integers(min_value=-1, max_value=4)

configs = st.builds(printmail.Config,
                    ring_id=st.floats(min_value=2, max_value=30),
                    wire_d=st.floats(min_value=0.2, max_value=4),
                    cols=dimensions,
                    rows=dimensions,
                    stacks=dimensions,
                    plate_gap=st.floats(min_value=0, max_value=3))
