"""Python versions of the ideas taught by the exercises, one module per topic."""