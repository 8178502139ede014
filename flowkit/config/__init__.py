"""Configuration model, validation, pre-processing and loading for Flow projects."""