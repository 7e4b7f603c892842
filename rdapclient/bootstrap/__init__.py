"""Service Registry files, questions and answers, registries and the bootstrap client."""