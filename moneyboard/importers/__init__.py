"""Package set aside for bank statement importers; it holds none yet."""