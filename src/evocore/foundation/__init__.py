"""Foundation layer: exceptions, logging, packaged data and benchmark problems."""
