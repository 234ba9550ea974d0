"""Constants shared by the simulator modules."""

import math

# sentinel distance for vertices not reached by ospf()
INFINITY = math.inf

DOWN_SUFFIX = " -- Down"

# output of the `draw` command when no file is given
DEFAULT_PLOT_PATH = "plots/topology.png"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"

# colors used by visualize_network
STATE_COLORS = {
    'up': '#97c2fc',
    'down': '#ef8d7a',
    'path': '#f1c40f',
}
