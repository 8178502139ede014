"""JSON conversion of the contracts, deployments, emulators and networks sections."""