''' Qt user interface for the Distribution Visualizer '''
